"""
Apillon MCP Test Suite

Covers the tool contract layer (validation, descriptors), the per-domain
dispatch of every tool onto the Apillon client, the router's single error
boundary, the REST client's request construction and the MCP server wiring.
The Apillon platform itself is replaced by mocks or an httpx mock transport.
"""
