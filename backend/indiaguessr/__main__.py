import uvicorn

from .config import get_settings


def main():
    settings = get_settings()
    uvicorn.run("indiaguessr.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
