import uvicorn

from relchain.config import ServerConfig, configure_logging

if __name__ == "__main__":
    config = ServerConfig.from_env()
    configure_logging(config.log_level)

    print("Starting Relationship Chain API Server...")
    print(f"Docs available at: http://localhost:{config.port}/docs")

    uvicorn.run(
        "relchain.api.server:app",
        host=config.host,
        port=config.port,
        reload=True
    )
