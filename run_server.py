#!/usr/bin/env python3
"""Run the Grass Fireworks API server"""

import uvicorn
import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from fireworks_api.config import global_config, server_config
from grass_fireworks.core import github_token


def main():
    """Run the FastAPI server"""
    host = server_config.get("server.host", "127.0.0.1")
    port = server_config.get("server.port", 8787)
    log_level = server_config.get("server.log_level", "info")

    print("Starting Grass Fireworks")
    print(f"Server: {host}:{port}")
    print(f"Log level: {log_level}")
    print(f"GitHub token: {'set' if github_token(global_config) else 'Not set'}")
    print(f"Cache: {'Enabled' if server_config.get('cache.enabled', True) else 'Disabled'}")
    print("-" * 50)

    uvicorn.run(
        "fireworks_api:app",
        host=host,
        port=port,
        log_level=log_level,
        reload=server_config.get("server.reload", False),
    )


if __name__ == "__main__":
    main()
