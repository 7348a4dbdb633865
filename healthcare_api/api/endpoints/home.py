from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from healthcare_api.core.config import settings

router = APIRouter()

RESOURCES = ["patients", "doctors", "appointments", "prescriptions", "summary"]

HOME_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <style>
    body {{
      font-family: 'Roboto', Arial, sans-serif;
      background: linear-gradient(120deg, #e0f7fa 0%, #f8bbd0 100%);
      margin: 0;
      min-height: 100vh;
      display: flex;
      align-items: center;
      justify-content: center;
    }}
    .container {{
      max-width: 600px;
      width: 100%;
      background: #fff;
      border-radius: 16px;
      box-shadow: 0 4px 24px rgba(0,0,0,0.08);
      padding: 32px;
      text-align: center;
    }}
    h1 {{ color: #1976d2; margin-bottom: 8px; }}
    .subtitle {{ color: #7b1fa2; margin-bottom: 24px; }}
    .links a {{
      display: inline-block;
      margin: 0 8px;
      padding: 12px 20px;
      background: #1976d2;
      color: #fff;
      border-radius: 8px;
      text-decoration: none;
      font-weight: 700;
    }}
    .links a:hover {{ background: #1565c0; }}
    .api-list {{ margin-top: 32px; text-align: left; }}
    .api-list h2 {{ color: #388e3c; }}
    .api-list ul {{ list-style: none; padding: 0; }}
    .api-list li {{ margin-bottom: 8px; }}
  </style>
</head>
<body>
  <div class="container">
    <h1>{title}</h1>
    <div class="subtitle">{description}</div>
    <div class="links">
      <a href="/api-docs" target="_blank">API Docs (Swagger)</a>
      <a href="/swagger.json" target="_blank">Swagger JSON</a>
      <a href="/summary" target="_blank">System Summary</a>
    </div>
    <div class="api-list">
      <h2>Available Endpoints</h2>
      <ul>
{endpoints}
      </ul>
    </div>
  </div>
</body>
</html>
"""


def render_home_page() -> str:
    endpoints = "\n".join(
        f"        <li><strong>{name.capitalize()}:</strong> <code>/{name}</code></li>"
        for name in RESOURCES
    )
    return HOME_PAGE.format(
        title=settings.PROJECT_NAME,
        description=settings.DESCRIPTION,
        endpoints=endpoints,
    )


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def home() -> str:
    return render_home_page()


@router.get("/health")
def health_check():
    return {"status": "ok"}
