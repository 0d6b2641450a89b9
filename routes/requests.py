# routes/requests.py - visitor movie requests

from fastapi import APIRouter, Request, Form
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from storage import add_request, get_site_config
from .common import render

router = APIRouter()


# ----------- PAGE -----------
@router.get("/request", response_class=HTMLResponse)
async def request_page(request: Request, message: str = ""):
    config = await get_site_config()
    return render(request, "request.html", {"config": config, "message": message})


# ----------- FORM SUBMIT -----------
@router.post("/request")
async def submit_request(movie_name: str = Form("")):
    name = movie_name.strip()
    if not name:
        return RedirectResponse("/request?message=Please+enter+a+movie+name", status_code=303)

    if await add_request(name):
        msg = "Request+sent+successfully"
    else:
        msg = "Failed+to+send+request"
    return RedirectResponse(f"/request?message={msg}", status_code=303)


# ----------- FLOATING MENU (JSON) -----------
@router.post("/api/request")
async def submit_request_json(request: Request):
    try:
        data = await request.json()
    except ValueError:
        data = None
    if not isinstance(data, dict):
        return JSONResponse({"success": False, "error": "Invalid request body"}, status_code=400)

    name = str(data.get("movieName", "")).strip()

    if not name:
        return JSONResponse({"success": False, "error": "Movie name is empty"}, status_code=400)

    if not await add_request(name):
        return JSONResponse({"success": False, "error": "Database error"}, status_code=500)
    return JSONResponse({"success": True, "message": "Request sent"})
