"""
slidev-mcp - Slidev rendering over the Model Context Protocol

Turns Slidev markdown into PNG slides, a PDF or a PPTX by delegating to the
`slidev` CLI, and ships a companion mini-app for editing and re-rendering.

Architecture:
- Rendering Context: Staging directories, renderer subprocess, output collection
- Serving Context: Response envelopes, MCP tools/resources, transports
"""

__version__ = "1.0.0"
