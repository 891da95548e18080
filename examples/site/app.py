"""Site — a small server-rendered site.

Demonstrates a default layout, an admin group with its own layout,
path parameters, a login-gate middleware that redirects, a custom
not-found page, and static files served from ``public/``.

Run (stdlib WSGI server, or any other WSGI host)::

    python app.py
"""

from pathlib import Path

from wren import App, AppConfig, get_request

HERE = Path(__file__).parent

app = App(AppConfig(template_dir=HERE / "app", static_dir=HERE / "public"))

app.layout("default")


@app.use
def require_login(next):
    request = get_request()
    if request.path.startswith("/admin") and request.path != "/admin/login":
        app.redirect("/admin/login")
    return next()


# Public routes


@app.get("/")
def home():
    return app.render("public/home", title="Home")


@app.get("/user/{id}")
def user(id):
    return app.render("public/user", title=f"User {id}", id=id)


@app.set_not_found
def not_found():
    return app.render("error", title="Not Found")


# Admin routes


def admin(r: App) -> None:
    r.layout("admin")
    r.get("/login", lambda: r.render("admin/login", title="Sign in"))
    r.get("/dashboard", lambda: r.render("admin/dashboard", title="Dashboard"))
    r.get("/settings", lambda: r.render("admin/settings", title="Settings"))


app.group("/admin", admin)


if __name__ == "__main__":
    from wsgiref.simple_server import make_server

    with make_server("127.0.0.1", 8000, app) as server:
        server.serve_forever()
