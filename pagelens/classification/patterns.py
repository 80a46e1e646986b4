"""
Static catalog of page patterns and their weighted signals.

Confidence for a pattern on a page is the plain sum of the weights of the
signals that fired. The catalog is built once at import and never mutated.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pagelens.classification.signals import PatternDefinition, SignalKind, exact, regex

K = SignalKind

_DEFINITIONS: tuple[PatternDefinition, ...] = (
    PatternDefinition(
        id="AUTH_PAGE",
        name="Authentication Page",
        description="Login, signup, or password reset pages",
        signals=(
            exact(K.INPUT_TYPE, "password", 30),
            exact(K.INPUT_TYPE, "email", 15),
            regex(K.INPUT_NAME, r"^(email|username|user|login)$", 15),
            regex(K.INPUT_NAME, r"^(password|pass|pwd)$", 20),
            regex(K.BUTTON_TEXT, r"^(log\s*in|sign\s*in|login|signin)$", 25),
            regex(K.BUTTON_TEXT, r"^(sign\s*up|register|create\s*account)$", 25),
            regex(K.BUTTON_TEXT, r"^(forgot\s*password|reset\s*password)$", 20),
            regex(K.LINK_TEXT, r"forgot.*password", 15),
            regex(K.LINK_TEXT, r"create.*account|sign.*up|register", 15),
            regex(K.VISIBLE_TEXT, r"sign\s*in\s*to\s*your\s*account", 20),
            regex(K.VISIBLE_TEXT, r"don'?t\s*have\s*an?\s*account", 15),
            regex(K.VISIBLE_TEXT, r"already\s*have\s*an?\s*account", 15),
            regex(K.URL, r"/(login|signin|auth|signup|register)", 25),
        ),
    ),
    PatternDefinition(
        id="SEARCH_PAGE",
        name="Search / Filter Page",
        description="Pages with search or filtering functionality",
        signals=(
            exact(K.INPUT_TYPE, "search", 35),
            regex(K.INPUT_NAME, r"^(search|query|q|keyword|find)$", 25),
            regex(K.INPUT_PLACEHOLDER, r"search", 20),
            regex(K.BUTTON_TEXT, r"^search$", 25),
            regex(K.BUTTON_TEXT, r"^(filter|apply\s*filters?)$", 20),
            regex(K.BUTTON_TEXT, r"^(find|look\s*up)$", 15),
            regex(K.VISIBLE_TEXT, r"search\s*results?", 20),
            regex(K.VISIBLE_TEXT, r"no\s*results?\s*found", 15),
            regex(K.VISIBLE_TEXT, r"filter\s*by", 20),
            regex(K.VISIBLE_TEXT, r"sort\s*by", 15),
            regex(K.URL, r"/(search|find|results|browse)", 20),
            regex(K.URL, r"[?&](q|query|search)=", 25),
        ),
    ),
    PatternDefinition(
        id="LANDING_PAGE",
        name="Landing / Marketing Page",
        description="Homepage or marketing landing pages",
        signals=(
            regex(K.BUTTON_TEXT, r"^(get\s*started|try\s*(it\s*)?free|start\s*(now|free|trial))$", 30),
            regex(K.BUTTON_TEXT, r"^(learn\s*more|see\s*how|discover)$", 20),
            regex(K.BUTTON_TEXT, r"^(book\s*a?\s*demo|request\s*demo|schedule\s*demo)$", 25),
            regex(K.BUTTON_TEXT, r"^(contact\s*sales|talk\s*to\s*sales)$", 20),
            regex(K.VISIBLE_TEXT, r"trusted\s*by|used\s*by.*companies", 20),
            regex(K.VISIBLE_TEXT, r"\d+[+k]?\s*(users?|customers?|companies)", 15),
            regex(K.VISIBLE_TEXT, r"free\s*trial|no\s*credit\s*card", 20),
            regex(K.VISIBLE_TEXT, r"features?|benefits?|why\s*choose", 15),
            regex(K.VISIBLE_TEXT, r"pricing|plans?", 10),
            regex(K.VISIBLE_TEXT, r"testimonials?|what\s*(our\s*)?(customers?|clients?)\s*say", 20),
            regex(K.LINK_TEXT, r"^(pricing|features?|about|blog|contact)$", 15),
            regex(K.URL, r"^https?://[^/]+/?$", 25),
            regex(K.URL, r"/(home|landing|welcome)$", 20),
        ),
    ),
    PatternDefinition(
        id="CONTENT_LISTING",
        name="Content / Listing Page",
        description="Pages displaying lists of items, articles, or products",
        signals=(
            regex(K.VISIBLE_TEXT, r"showing\s*\d+.*results?", 25),
            regex(K.VISIBLE_TEXT, r"page\s*\d+\s*(of\s*\d+)?", 20),
            regex(K.VISIBLE_TEXT, r"next\s*page|previous\s*page", 15),
            regex(K.VISIBLE_TEXT, r"load\s*more|show\s*more", 15),
            regex(K.VISIBLE_TEXT, r"items?\s*per\s*page", 15),
            regex(K.LINK_TEXT, r"^(next|prev(ious)?|\d+|»|«|>|<)$", 15),
            regex(K.LINK_HREF, r"[?&]page=\d+", 20),
            regex(K.URL, r"/(products?|items?|listings?|catalog|articles?|posts?|blog)", 20),
            regex(K.URL, r"/category/", 15),
        ),
    ),
    PatternDefinition(
        id="CONTACT_SUPPORT",
        name="Contact / Support Page",
        description="Contact forms, support pages, help centers",
        signals=(
            regex(K.INPUT_NAME, r"^(name|fullname|first.?name)$", 10),
            regex(K.INPUT_NAME, r"^(email|e-mail)$", 10),
            regex(K.INPUT_NAME, r"^(message|subject|inquiry|question)$", 20),
            exact(K.INPUT_TYPE, "textarea", 15),
            regex(K.BUTTON_TEXT, r"^(send|submit|contact\s*us)$", 20),
            regex(K.BUTTON_TEXT, r"^(get\s*help|ask\s*a?\s*question)$", 20),
            regex(K.VISIBLE_TEXT, r"contact\s*us|get\s*in\s*touch", 25),
            regex(K.VISIBLE_TEXT, r"support|help\s*center|faq", 20),
            regex(K.VISIBLE_TEXT, r"email\s*us|call\s*us|write\s*to\s*us", 20),
            regex(K.VISIBLE_TEXT, r"phone|telephone|address|location", 15),
            regex(K.VISIBLE_TEXT, r"business\s*hours|office\s*hours", 15),
            regex(K.URL, r"/(contact|support|help|faq|reach-us)", 25),
        ),
    ),
    PatternDefinition(
        id="ECOMMERCE",
        name="E-commerce Page",
        description="Shopping, cart, and checkout pages",
        signals=(
            regex(K.BUTTON_TEXT, r"^(add\s*to\s*cart|buy\s*now|purchase)$", 35),
            regex(K.BUTTON_TEXT, r"^(checkout|proceed\s*to\s*checkout)$", 30),
            regex(K.BUTTON_TEXT, r"^(view\s*cart|shopping\s*cart)$", 25),
            regex(K.VISIBLE_TEXT, r"\$\d+\.?\d*|\d+\.?\d*\s*(USD|EUR|GBP)", 20),
            regex(K.VISIBLE_TEXT, r"add\s*to\s*cart|in\s*stock|out\s*of\s*stock", 25),
            regex(K.VISIBLE_TEXT, r"free\s*shipping|shipping.*\$", 20),
            regex(K.VISIBLE_TEXT, r"quantity|qty", 15),
            regex(K.VISIBLE_TEXT, r"your\s*cart|shopping\s*cart", 25),
            regex(K.LINK_TEXT, r"^(cart|checkout|shop|store)$", 20),
            regex(K.URL, r"/(shop|store|cart|checkout|product)", 25),
        ),
    ),
    PatternDefinition(
        id="DASHBOARD",
        name="Dashboard / App Page",
        description="Application dashboards and user portals",
        signals=(
            regex(K.VISIBLE_TEXT, r"dashboard|overview|analytics", 25),
            regex(K.VISIBLE_TEXT, r"welcome\s*back|hello,?\s*\w+", 20),
            regex(K.VISIBLE_TEXT, r"my\s*account|my\s*profile|settings", 20),
            regex(K.VISIBLE_TEXT, r"recent\s*activity|notifications?", 15),
            regex(K.VISIBLE_TEXT, r"log\s*out|sign\s*out", 20),
            regex(K.LINK_TEXT, r"^(dashboard|settings|profile|account|logout)$", 20),
            regex(K.URL, r"/(dashboard|app|portal|admin|account|settings)", 25),
        ),
    ),
    PatternDefinition(
        id="PRICING_PAGE",
        name="Pricing Page",
        description="Pricing plans and subscription pages",
        signals=(
            regex(K.VISIBLE_TEXT, r"pricing|plans?\s*&?\s*pricing", 30),
            regex(K.VISIBLE_TEXT, r"\$\d+\s*/?\s*(mo|month|year|yr)", 35),
            regex(K.VISIBLE_TEXT, r"free\s*plan|basic\s*plan|pro\s*plan|enterprise", 25),
            regex(K.VISIBLE_TEXT, r"per\s*(user|seat|month)", 20),
            regex(K.VISIBLE_TEXT, r"billed\s*(monthly|annually|yearly)", 25),
            regex(K.VISIBLE_TEXT, r"compare\s*plans?|all\s*features?", 20),
            regex(K.BUTTON_TEXT, r"^(choose|select|get)\s*(this\s*)?(plan|started)$", 25),
            regex(K.BUTTON_TEXT, r"^(upgrade|subscribe|start\s*free\s*trial)$", 25),
            regex(K.URL, r"/(pricing|plans|subscribe)", 30),
        ),
    ),
    PatternDefinition(
        id="UPLOAD_PAGE",
        name="Upload / Submit Page",
        description="Pages for uploading files, media, or submitting user content",
        signals=(
            # File inputs are the strongest upload indicator.
            exact(K.INPUT_TYPE, "file", 40),
            regex(K.INPUT_NAME, r"^(file|upload|attachment|document|media|image|video|photo)s?$", 25),
            regex(K.BUTTON_TEXT, r"^(upload|upload\s*file|upload\s*files?)$", 30),
            regex(K.BUTTON_TEXT, r"^(choose\s*file|select\s*file|browse\s*files?)$", 25),
            regex(K.BUTTON_TEXT, r"^(submit|publish|post|share)$", 15),
            regex(K.BUTTON_TEXT, r"^(add\s*(file|image|photo|video|media|document))$", 25),
            regex(K.VISIBLE_TEXT, r"drag\s*(and|&)?\s*drop", 30),
            regex(K.VISIBLE_TEXT, r"drop\s*(your\s*)?(files?|images?|documents?)\s*here", 30),
            regex(
                K.VISIBLE_TEXT,
                r"upload\s*(your\s*)?(files?|images?|photos?|videos?|documents?|content)",
                25,
            ),
            regex(K.VISIBLE_TEXT, r"select\s*(a\s*)?(file|image|photo|video|document)\s*to\s*upload", 25),
            regex(K.VISIBLE_TEXT, r"supported\s*(file\s*)?(formats?|types?)", 20),
            regex(K.VISIBLE_TEXT, r"max(imum)?\s*(file\s*)?size", 20),
            regex(K.VISIBLE_TEXT, r"\.(jpg|jpeg|png|gif|pdf|doc|docx|mp4|mov|zip)", 15),
            regex(K.VISIBLE_TEXT, r"click\s*(here\s*)?to\s*(upload|browse|select)", 20),
            regex(K.URL, r"/(upload|submit|import|add-file|new-post|create|share)", 25),
            regex(K.URL, r"/(media|files?|documents?|attachments?)", 20),
        ),
    ),
)

PATTERNS: Mapping[str, PatternDefinition] = MappingProxyType(
    {definition.id: definition for definition in _DEFINITIONS}
)
