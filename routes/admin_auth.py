# routes/admin_auth.py

from fastapi import APIRouter, Request, Form
from fastapi.responses import HTMLResponse, RedirectResponse

from auth_utils import is_authenticated, login, logout
from .common import render

router = APIRouter()


# ---------- LOGIN / LOGOUT ----------


@router.get("/login", response_class=HTMLResponse)
async def admin_login_form(request: Request):
    if is_authenticated(request):
        return RedirectResponse("/admin", status_code=303)
    return render(request, "login.html", {"error": ""})


@router.post("/login", response_class=HTMLResponse)
async def admin_login(request: Request, email: str = Form(""), password: str = Form("")):
    if await login(request, email, password):
        return RedirectResponse("/admin", status_code=303)

    return render(
        request,
        "login.html",
        {"error": "Invalid email or password.", "email": email},
    )


@router.get("/logout")
async def admin_logout(request: Request):
    logout(request)
    return RedirectResponse("/", status_code=303)
