"""decaysearch MCP Server: exposes vector generation to MCP clients."""

from __future__ import annotations

import json

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from decaysearch.config import DecaySearchConfig
from decaysearch.console import Console
from decaysearch.core.sanitize import sanitize
from decaysearch.core.syntax import is_balanced, process_term
from decaysearch.core.types import GenerationParams
from decaysearch.exceptions import EmptyQueryError, InvalidParamsError
from mcp_server.tools import TOOL_DEFINITIONS

app = Server("decaysearch")
_config = DecaySearchConfig.from_env()
_console: Console | None = None


def _get_console() -> Console:
    global _console
    if _console is None:
        _console = Console(config=_config)
    return _console


# ------------------------------------------------------------------
# Tools
# ------------------------------------------------------------------

@app.list_tools()
async def list_tools() -> list[Tool]:
    return [Tool(**td) for td in TOOL_DEFINITIONS]


@app.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    try:
        result = _dispatch(name, arguments)
        return [TextContent(type="text", text=json.dumps(result, default=str))]
    except Exception as exc:
        return [TextContent(type="text", text=f"Error: {exc}")]


def _dispatch(name: str, args: dict) -> dict:
    if name == "vectors_generate":
        try:
            params = GenerationParams(
                vector_count=args.get("vector_count", _config.vector_count),
                density=args.get("density", _config.density),
                page_offset=args.get("page_offset", _config.page_offset),
            )
            result = _get_console().generate(args["query"], params)
        except EmptyQueryError:
            return {"error": "Query is empty"}
        except (InvalidParamsError, ValueError) as exc:
            return {"error": str(exc)}
        return {
            "term": result.term,
            "urls": result.urls,
            "primary": result.primary,
            "diagnostics": [d.model_dump(mode="json") for d in result.diagnostics],
            "count": len(result.urls),
        }

    if name == "query_sanitize":
        clean = sanitize(args["query"])
        return {"query": clean, "changed": clean != args["query"]}

    if name == "syntax_check":
        query = args["query"]
        return {"balanced": is_balanced(query), "processed": process_term(query)}

    return {"error": f"Unknown tool: {name}"}


# ------------------------------------------------------------------
# Main
# ------------------------------------------------------------------

async def main():
    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())


if __name__ == "__main__":
    import asyncio

    asyncio.run(main())
