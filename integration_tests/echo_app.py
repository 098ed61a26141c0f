import asyncio
import hashlib

from fastapi import FastAPI
from fastapi import Request
from fastapi import Response
from fastapi.responses import RedirectResponse

app = FastAPI()

REPORT = b"%PDF-1.4 " + b"X" * 100000


@app.api_route("/echo", methods=["GET", "POST"])
async def echo(request: Request):
    body = await request.body()
    return Response(
        body,
        media_type="text/plain; charset=utf-8",
        headers={"X-Body-Sha256": hashlib.sha256(body).hexdigest()},
    )


@app.get("/headers")
async def headers(request: Request):
    return dict(request.headers)


@app.get("/status/{code}")
async def status(code: int):
    return Response(f"status {code}", status_code=code, media_type="text/plain")


@app.get("/slow")
async def slow(seconds: float = 1.0):
    await asyncio.sleep(seconds)
    return Response("done", media_type="text/plain")


@app.get("/files/report.pdf")
async def report():
    return Response(REPORT, media_type="application/pdf")


@app.get("/redirect")
async def redirect():
    return RedirectResponse("/files/report.pdf")
