"""
HTTP-level cross-cutting concerns.

Pure ASGI building blocks: the validation failure middleware, the send
wrapper running pre-start header hooks, and the no-cache header set.
"""
