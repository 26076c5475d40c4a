from pathlib import Path
from jinja2 import Environment, FileSystemLoader

from schema_resume import ResumeDocument

_CSS_PATH = Path(__file__).parent / "static" / "style.css"
env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=True, trim_blocks=True, lstrip_blocks=True)


def profile_link(handle: str, prefix: str) -> tuple[str, str]:
    """'linkedin.com/in/jane' → ('https://linkedin.com/in/jane', 'linkedin.com/in/jane')."""
    handle = handle.strip()
    href = handle if handle.startswith("http") else f"https://{handle}"
    return href, f"{prefix}/{handle.rstrip('/').split('/')[-1]}"


env.globals["profile_link"] = profile_link


def resume_to_html(resume: ResumeDocument, inline: bool = False) -> str:
    """Render résumé → HTML.  If inline=True, embed CSS in a <style> tag."""
    css_inline = _CSS_PATH.read_text(encoding="utf-8") if inline else ""
    return env.get_template("resume.html").render(r=resume, inline_css=css_inline)


def print_page(html: str) -> str:
    """Put a print button above a rendered résumé; it is hidden on paper."""
    button = (
        '<div class="no-print toolbar">'
        '<button onclick="window.print()">🖨️ Print to PDF</button>'
        "</div>"
    )
    return html.replace("<body>", f"<body>{button}", 1)
