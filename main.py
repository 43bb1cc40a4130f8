import uvicorn
import os
from dotenv import load_dotenv
from header_editor.config.rules import HEADER_RULES
from header_editor.core.echo import EchoHeadersApp
from header_editor.core.logging_setup import configure_logging
from header_editor.core.pipeline import apply_header_rules

# Load environment variables from .env file
load_dotenv()
configure_logging()

host = os.getenv("HEADER_EDITOR_HOST", "0.0.0.0")
port = int(os.getenv("HEADER_EDITOR_PORT", "8080"))

# Broken rules fail here, before uvicorn binds
app = apply_header_rules(EchoHeadersApp(), HEADER_RULES)

if __name__ == "__main__":
    uvicorn.run(app, host=host, port=port)
