"""Scaffolding templates — plain Python strings for generated handlers.

Simple ``str.format()`` substitution with ``{method}``, ``{path}`` and
``{name}`` (the path without its leading slash).
"""

HANDLER_PY = """\
\"\"\"Handler for {method} {path}.\"\"\"

import json


async def handler(request, context):
    # Implementation for {name}
    return {{
        "statusCode": 200,
        "body": json.dumps({{"message": "Hello from {name}!"}}),
    }}
"""
