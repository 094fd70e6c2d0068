# 不参与渲染的标签
NON_VISUAL_TAGS = ["meta", "script"]

RAW_TEXT_TAGS = ["style", "script"]

BOX_PROPERTIES = ["margin", "padding"]

BOX_SIDES = ["top", "right", "bottom", "left"]

COLOR_PROPERTIES = ["color", "background-color"]

UNITS = {
    "em": "em", "ex": "ex", "ch": "ch", "rem": "rem",
    "vh": "vh", "vw": "vw", "vmin": "vmin", "vmax": "vmax",
    "px": "px", "mm": "mm", "q": "q", "cm": "cm", "in": "in",
    "pt": "pt", "pc": "pc", "%": "pct",
}

DEFAULT_UNIT = "px"

DISPLAY_KEYWORDS = {
    "none": "none",
    "block": "block",
    "inline": "inline",
    "inline-block": "inline-block",
    "flex": "flex",
}

DEFAULT_DISPLAY = "block"
