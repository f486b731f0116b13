"""
Pydantic request models for the WMS bridge routes.

Field names are snake_case in Python and accept the camelCase names the
WMS itself uses (``startDate``, ``depositorId``, ...) as aliases.
"""
