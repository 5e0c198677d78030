"""MCP tool definitions for decaysearch."""

TOOL_DEFINITIONS = [
    {
        "name": "vectors_generate",
        "description": (
            "Turn a search phrase into a batch of decayed search-engine URLs."
            " The first URL is the primary vector."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "The search phrase",
                },
                "vector_count": {
                    "type": "integer",
                    "description": "Number of URLs to generate",
                    "default": 10,
                    "minimum": 1,
                    "maximum": 20,
                },
                "density": {
                    "type": "integer",
                    "description": "Base number of site clauses before decay (>600 risks HTTP 414)",
                    "default": 257,
                    "minimum": 128,
                    "maximum": 1024,
                },
                "page_offset": {
                    "type": "integer",
                    "description": "Result page (start = page_offset * 10)",
                    "default": 0,
                    "minimum": 0,
                    "maximum": 9,
                },
            },
            "required": ["query"],
        },
    },
    {
        "name": "query_sanitize",
        "description": "Strip control characters and straighten curly quotes in a phrase.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Raw phrase"},
            },
            "required": ["query"],
        },
    },
    {
        "name": "syntax_check",
        "description": (
            "Check whether a phrase has balanced parentheses and show the"
            " escaped form that would be embedded if not."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Phrase to check"},
            },
            "required": ["query"],
        },
    },
]
