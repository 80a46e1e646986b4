"""
tests/test_html_extractor.py

Markup extraction with BeautifulSoup: no network, static HTML only.
"""

from __future__ import annotations

from pagelens.crawling.parsing import PageExtractionParser

HTML = """
<html>
  <head>
    <title> Acme | Sign in </title>
    <style>.hidden { display: none }</style>
  </head>
  <body>
    <script>var tracking = "do not index";</script>
    <h1>Sign in to your account</h1>
    <p>Don't have an account?   <a href="/signup">Create account</a></p>
    <form>
      <input type="email" name="email" placeholder="you@example.com">
      <input type="PASSWORD" id="pwd">
      <input name="remember">
      <textarea name="message"></textarea>
      <select id="plan"><option>Pro</option></select>
      <input type="submit" value="Log In">
      <input type="button" value="">
      <button>Continue</button>
      <button type="button">  Show   password </button>
      <button type="button"></button>
    </form>
    <a class="btn" href="https://example.com/trial">Start free trial</a>
    <a href="pricing">Pricing</a>
    <a href="">Empty</a>
    <a>No href</a>
    <noscript>Enable JavaScript</noscript>
  </body>
</html>
"""


def _parse():
    return PageExtractionParser.parse(html=HTML, final_url="https://example.com/login")


def test_title_and_final_url() -> None:
    extraction = _parse()
    assert extraction.title == "Acme | Sign in"
    assert extraction.final_url == "https://example.com/login"


def test_visible_text_excludes_scripts_and_styles() -> None:
    text = _parse().visible_text
    assert "Sign in to your account" in text
    assert "Don't have an account?" in text
    assert "tracking" not in text
    assert "display: none" not in text
    assert "Enable JavaScript" not in text


def test_inputs() -> None:
    assert _parse().inputs == [
        {"type": "email", "name": "email", "placeholder": "you@example.com"},
        {"type": "password", "name": "pwd", "placeholder": ""},
        {"type": "text", "name": "remember", "placeholder": ""},
        {"type": "textarea", "name": "message", "placeholder": ""},
        {"type": "select", "name": "plan", "placeholder": ""},
        {"type": "submit", "name": "", "placeholder": ""},
        {"type": "button", "name": "", "placeholder": ""},
    ]


def test_buttons_collect_submit_controls_and_button_links() -> None:
    assert _parse().buttons == [
        {"text": "Continue", "type": "submit"},
        {"text": "Show password", "type": "button"},
        {"text": "Log In", "type": "submit"},
        {"text": "Start free trial", "type": "link-button"},
    ]


def test_links_are_absolute() -> None:
    links = _parse().links
    hrefs = [link["href"] for link in links]
    assert hrefs == [
        "https://example.com/signup",
        "https://example.com/trial",
        "https://example.com/pricing",
    ]
    assert links[0]["text"] == "Create account"


def test_base_href_is_honoured() -> None:
    html = (
        '<html><head><base href="https://cdn.example.com/docs/"></head>'
        '<body><a href="intro">Intro</a></body></html>'
    )
    extraction = PageExtractionParser.parse(html=html, final_url="https://example.com/")
    assert extraction.links == [{"href": "https://cdn.example.com/docs/intro", "text": "Intro"}]


def test_link_text_is_truncated() -> None:
    html = f'<a href="/long">{"word " * 60}</a>'
    extraction = PageExtractionParser.parse(html=html, final_url="https://example.com/")
    assert len(extraction.links[0]["text"]) == 100


def test_visible_text_override() -> None:
    extraction = PageExtractionParser.parse(
        html="<body><p>markup text</p></body>",
        final_url="https://example.com/",
        visible_text="laid out text",
    )
    assert extraction.visible_text == "laid out text"


def test_empty_document() -> None:
    extraction = PageExtractionParser.parse(html="", final_url="https://example.com/")
    assert extraction.title == ""
    assert extraction.visible_text == ""
    assert extraction.inputs == []
    assert extraction.buttons == []
    assert extraction.links == []
