import uvicorn
from pagemeta.config.event_loop import setup_event_loop

setup_event_loop()

# Set up logging first
from pagemeta.config.logging_config import setup_logging
setup_logging()

from pagemeta.core.config import settings
from pagemeta.main import app

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.server_reload,
        reload_dirs=["."]
    )
