"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

LogicBoxes SDK - Python client for the LogicBoxes / ResellerClub reseller API

Encodes typed criteria and form records into query parameters, dispatches
authenticated calls and decodes the API's loosely-typed JSON responses.
"""

from logicboxes._version import __version__

__all__ = ["__version__"]
