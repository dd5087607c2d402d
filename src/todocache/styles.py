# =========================
# TODOCACHE/STYLES.PY
# =========================

from __future__ import annotations

"""
Class tokens for the todo page (light slate, tailwind utility classes).

Rules:
- Pages use the C_* aliases, never long inline class strings.
- The card defines padding, inner layout uses gap only.
"""

# WICHTIG: Alle CSS-Klammern {{ }} sind doppelt, damit Python sie nicht als Variablen liest!
APP_HEAD_CSS = f"""
<style>
  body, .q-body, .nicegui-content {{
    background: #f8fafc !important;
    color: #0f172a !important;
  }}
  .q-card, .q-dialog, .q-btn {{
    box-shadow: none !important;
  }}
</style>
"""

# -------------------------
# Design system class tokens
# -------------------------

STYLE_CONTAINER = "w-full max-w-3xl mx-auto px-6 py-6 gap-6"
STYLE_CARD = "bg-white border border-slate-200 shadow-sm rounded-xl"

STYLE_PAGE_TITLE = "text-2xl font-bold tracking-tight text-slate-900"
STYLE_SECTION_TITLE = "text-sm font-semibold text-slate-900"
STYLE_TEXT_SUBTLE = "text-sm text-slate-500"

STYLE_BTN_PRIMARY = (
    "bg-slate-900 text-white hover:bg-slate-800 active:scale-[0.99] rounded-lg px-4 py-2 text-sm "
    "font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-amber-400/40"
)
STYLE_BTN_SECONDARY = (
    "bg-white text-slate-900 border border-slate-200 hover:bg-slate-50 active:scale-[0.99] rounded-lg px-4 py-2 "
    "text-sm font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-slate-400/30"
)
STYLE_BTN_GHOST = (
    "text-slate-600 hover:text-slate-900 hover:bg-slate-100 active:scale-[0.99] rounded-md px-3 py-2 text-sm "
    "font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-slate-400/30"
)
STYLE_BTN_DANGER = (
    "bg-rose-600 text-white hover:bg-rose-700 active:scale-[0.99] rounded-lg px-4 py-2 text-sm "
    "font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-rose-500/30"
)

STYLE_TODO_ROW = "w-full px-3 py-2 items-center justify-between border-b border-slate-200/70"
STYLE_TODO_TITLE = "text-sm text-slate-800"
STYLE_TODO_TITLE_DONE = "text-sm text-slate-400 line-through"

STYLE_STATUS = "text-sm text-slate-600 min-h-[1.25rem]"
STYLE_STATUS_ERROR = "text-sm text-rose-700 min-h-[1.25rem]"

# Aliases used by pages
C_CONTAINER = STYLE_CONTAINER
C_CARD = STYLE_CARD
C_PAGE_TITLE = STYLE_PAGE_TITLE
C_SECTION_TITLE = STYLE_SECTION_TITLE
C_BTN_PRIM = STYLE_BTN_PRIMARY
C_BTN_SEC = STYLE_BTN_SECONDARY
C_BTN_GHOST = STYLE_BTN_GHOST
C_BTN_DANGER = STYLE_BTN_DANGER
