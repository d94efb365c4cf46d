"""
Brewery Backend — Streaming JSON Array Responses
==================================================

What:  Turns an async iterator of pydantic models into a chunked JSON array.
Why:   Collection endpoints emit rows as the repository yields them instead
       of buffering the whole table in memory.
How:   The first element is fetched before the response starts, so a failing
       query still reaches the exception handlers as a proper 500 rather
       than a truncated 200. The rest is written element by element.
       However the body ends (completed, failed or the client disconnecting),
       the source generator is closed so its database session is released.
"""

from typing import AsyncGenerator, AsyncIterator, Dict, Optional

from pydantic import BaseModel
from starlette.responses import StreamingResponse


async def json_array_response(
    items: AsyncGenerator[BaseModel, None],
    headers: Optional[Dict[str, str]] = None,
) -> StreamingResponse:
    first = await anext(items, None)

    async def body() -> AsyncIterator[str]:
        try:
            yield "["
            if first is not None:
                yield first.model_dump_json(by_alias=True)
                async for item in items:
                    yield ","
                    yield item.model_dump_json(by_alias=True)
            yield "]"
        finally:
            # Releases the repository session when the client goes away mid-stream
            await items.aclose()

    return StreamingResponse(body(), media_type="application/json", headers=headers)
