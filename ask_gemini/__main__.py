import uvicorn

from ask_gemini.config import settings

host = settings.host
port = settings.port
reload_opt = settings.reload

if __name__ == "__main__":
    # ``python -m ask_gemini`` serves ``ask_gemini.api:app``; the import string
    # lets uvicorn re-import the app when ``RELOAD`` is on.
    uvicorn.run("ask_gemini.api:app", host=host, port=port, reload=reload_opt)
