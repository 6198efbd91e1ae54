"""Run the explorer API with uvicorn: python -m bap_explorer"""
import uvicorn

from bap_explorer.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("bap_explorer.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
