"""Tests for the embed builders."""

from __future__ import annotations

from datetime import datetime, timezone

from discord_rest.embeds import (
    DESCRIPTION_LIMIT,
    FIELD_VALUE_LIMIT,
    MAX_FIELDS,
    TITLE_LIMIT,
    _truncate,
    build_embed,
    field,
)


class TestTruncate:
    def test_short_text_untouched(self) -> None:
        assert _truncate("abc", 10) == "abc"

    def test_long_text_gets_ellipsis(self) -> None:
        assert _truncate("abcdefghij", 6) == "abc..."

    def test_tiny_limit_hard_cut(self) -> None:
        assert _truncate("abcdef", 2) == "ab"


class TestBuildEmbed:
    def test_only_given_keys_present(self) -> None:
        assert build_embed(description="hi") == {"description": "hi"}

    def test_full_embed(self) -> None:
        embed = build_embed(
            "Deploy finished",
            "All services are up",
            url="https://example.com/run/1",
            color=0xFFFFFF,
            fields=[field("`Env`", "prod", inline=True)],
            author="ci",
            author_icon="https://example.com/ci.png",
            footer="build 42",
            footer_icon="https://example.com/f.png",
            image="https://example.com/graph.png",
            thumbnail="https://example.com/t.png",
        )

        assert embed["title"] == "Deploy finished"
        assert embed["color"] == 0xFFFFFF
        assert embed["fields"] == [{"name": "`Env`", "value": "prod", "inline": True}]
        assert embed["author"] == {"name": "ci", "icon_url": "https://example.com/ci.png"}
        assert embed["footer"] == {"text": "build 42", "icon_url": "https://example.com/f.png"}
        assert embed["image"] == {"url": "https://example.com/graph.png"}
        assert embed["thumbnail"] == {"url": "https://example.com/t.png"}
        assert "timestamp" not in embed

    def test_limits_applied(self) -> None:
        embed = build_embed(
            "t" * 300,
            "d" * 5000,
            fields=[field("n", "v" * 2000) for _ in range(30)],
        )

        assert len(embed["title"]) == TITLE_LIMIT
        assert len(embed["description"]) == DESCRIPTION_LIMIT
        assert len(embed["fields"]) == MAX_FIELDS
        assert len(embed["fields"][0]["value"]) == FIELD_VALUE_LIMIT

    def test_explicit_timestamp(self) -> None:
        when = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert build_embed("x", timestamp=when)["timestamp"] == "2024-01-02T03:04:05+00:00"

    def test_now_timestamp_is_utc(self) -> None:
        stamp = build_embed("x", timestamp=True)["timestamp"]
        assert datetime.fromisoformat(stamp).tzinfo is not None
