#!/usr/bin/env python3
"""
Entry point for running the weekly pairs web server.

Usage:
    python run_web.py [--host HOST] [--port PORT] [--reload] [--log-level LEVEL]

Examples:
    python run_web.py                    # Serve on localhost:8000
    python run_web.py --host 0.0.0.0     # Accept outside connections
    python run_web.py --log-level debug  # Verbose server logs
"""
import argparse
import uvicorn


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Run the weekly pairs web server")
    parser.add_argument("--host", type=str, default="127.0.0.1",
                        help="Host to bind to (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000,
                        help="Port to bind to (default: 8000)")
    parser.add_argument("--reload", action="store_true",
                        help="Restart the server when source files change")
    parser.add_argument("--log-level", type=str, default="info",
                        choices=["critical", "error", "warning", "info", "debug"],
                        help="Server log level (default: info)")
    return parser.parse_args(argv)


def main():
    args = parse_args()

    print(f"Weekly pairs API at http://{args.host}:{args.port}/api/schedule")
    print(f"Docs at http://{args.host}:{args.port}/docs")

    uvicorn.run(
        "src.web.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level
    )


if __name__ == "__main__":
    main()
