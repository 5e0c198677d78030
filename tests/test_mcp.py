"""Tests for MCP server tool dispatch logic (no actual MCP transport)."""

import pytest

from decaysearch.config import DecaySearchConfig


@pytest.fixture(autouse=True)
def _isolate():
    import mcp_server.server as srv

    srv._config = DecaySearchConfig()
    srv._console = None


class TestMCPDispatch:
    def test_generate(self):
        from mcp_server.server import _dispatch

        result = _dispatch("vectors_generate", {"query": "test", "vector_count": 5})
        assert result["count"] == 5
        assert result["primary"] == result["urls"][0]
        assert result["diagnostics"] == []

    def test_generate_diagnostics(self):
        from mcp_server.server import _dispatch

        result = _dispatch("vectors_generate", {"query": "a)b(", "density": 800})
        kinds = [d["kind"] for d in result["diagnostics"]]
        assert kinds == ["unbalanced-syntax", "density-risk"]
        assert result["term"] == "a\\)b\\("

    def test_generate_empty(self):
        from mcp_server.server import _dispatch

        assert "error" in _dispatch("vectors_generate", {"query": "\x00"})

    def test_generate_out_of_range(self):
        from mcp_server.server import _dispatch

        assert "error" in _dispatch("vectors_generate", {"query": "x", "density": 5000})
        assert "error" in _dispatch("vectors_generate", {"query": "x", "vector_count": 0})
        assert "error" in _dispatch("vectors_generate", {"query": "x", "page_offset": -2})

    def test_sanitize(self):
        from mcp_server.server import _dispatch

        result = _dispatch("query_sanitize", {"query": " “hi”\x7f"})
        assert result == {"query": '"hi"', "changed": True}

    def test_syntax_check(self):
        from mcp_server.server import _dispatch

        assert _dispatch("syntax_check", {"query": "(ok)"}) == {
            "balanced": True,
            "processed": "(ok)",
        }
        assert _dispatch("syntax_check", {"query": ")("})["processed"] == "\\)\\("

    def test_unknown_tool(self):
        from mcp_server.server import _dispatch

        result = _dispatch("nonexistent_tool", {})
        assert "error" in result
