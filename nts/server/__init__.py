"""
NTS Server Package.

This package contains the web server implementation for the newsletter service.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    middleware: Request logging middleware.
    exception_handlers: Application-wide exception handlers.

Modules:
    main: Application factory.
    startup: uvicorn wiring for pre-bound listeners and production startup.
    deps: Request-scoped dependencies read from application state.
"""
