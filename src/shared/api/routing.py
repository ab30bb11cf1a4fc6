"""
Shared API Routing
==================

Route class that decodes JSON request bodies with exact decimals.

Starlette decodes JSON numbers into floats, which drops digits of large
fixed-point values before pydantic sees them. Routers that carry money
amounts use ``DecimalJSONRoute`` so fractional numbers arrive as ``Decimal``.
"""

import json
from decimal import Decimal
from typing import Any, Callable

from fastapi import Request, Response
from fastapi.routing import APIRoute


class DecimalJSONRequest(Request):
    """Request whose ``json()`` keeps fractional numbers as ``Decimal``."""

    async def json(self) -> Any:
        if not hasattr(self, "_json"):
            body = await self.body()
            self._json = json.loads(body, parse_float=Decimal)
        return self._json


class DecimalJSONRoute(APIRoute):
    """APIRoute that hands ``DecimalJSONRequest`` to the endpoint machinery."""

    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()

        async def decimal_route_handler(request: Request) -> Response:
            request = DecimalJSONRequest(request.scope, request.receive)
            return await original_route_handler(request)

        return decimal_route_handler
