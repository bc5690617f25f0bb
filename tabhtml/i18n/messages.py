"""Message catalog, keyed by locale then message name."""

from __future__ import annotations

from typing import Dict

DEFAULT_LOCALE = "en"

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "name": "Tabs as HTML",
        "mytabs": "My tabs %s",
        "ashtml": "As HTML",
        "window": "Group by window",
        "stack": "Group by stack",
        "host": "Group by host",
        "indent": "Indent groups",
        "windowLabel": "Window",
        "stackLabel": "Stack",
        "stackUnavailable": "Tab stacks are not available in this browser; grouping by stack is off.",
    },
    "de": {
        "name": "Tabs als HTML",
        "mytabs": "Meine Tabs %s",
        "ashtml": "Als HTML",
        "window": "Nach Fenster gruppieren",
        "stack": "Nach Stapel gruppieren",
        "host": "Nach Host gruppieren",
        "indent": "Gruppen einrücken",
        "windowLabel": "Fenster",
        "stackLabel": "Stapel",
        "stackUnavailable": "Tab-Stapel gibt es in diesem Browser nicht; Gruppierung nach Stapel ist aus.",
    },
    "fr": {
        "name": "Onglets en HTML",
        "mytabs": "Mes onglets %s",
        "ashtml": "En HTML",
        "window": "Grouper par fenêtre",
        "stack": "Grouper par pile",
        "host": "Grouper par hôte",
        "indent": "Indenter les groupes",
        "windowLabel": "Fenêtre",
        "stackLabel": "Pile",
        "stackUnavailable": "Les piles d'onglets ne sont pas disponibles dans ce navigateur ; le regroupement par pile est désactivé.",
    },
}


def resolve_locale(locale: str | None) -> str:
    """Map `de-AT` / `de_AT` style tags onto a catalog locale, falling back to English."""
    tag = (locale or "").strip().replace("_", "-").lower()
    if tag in MESSAGES:
        return tag
    language = tag.split("-", 1)[0]
    if language in MESSAGES:
        return language
    return DEFAULT_LOCALE


def get_message(key: str, locale: str | None = DEFAULT_LOCALE) -> str:
    catalog = MESSAGES[resolve_locale(locale)]
    if key in catalog:
        return catalog[key]
    return MESSAGES[DEFAULT_LOCALE][key]
