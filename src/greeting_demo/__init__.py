"""
Hello greetings demo package.

Provides:
- A FastAPI proxy that asks a chat-completion API for five "Hello, World!" variations
- A client view model (and CLI) that calls the proxy and holds the display state
"""
