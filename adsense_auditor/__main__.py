import uvicorn

from adsense_auditor import config


def main():
    uvicorn.run("adsense_auditor.app:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
