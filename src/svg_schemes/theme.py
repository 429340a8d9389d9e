"""Pure data: defaults, color roles, the SVG template and preview layout.

No library imports beyond the standard library. Everything here is read-only
configuration shared by the parser, the renderer and the preview chart.
"""

from string import Template

DEFAULT_TITLE = "Color Scheme by Person"
CURRENT_VERSION = 2

# Slot index -> (attribute name, label written next to the rule)
ROLES = (
    ("background", "Background"),
    ("foreground", "Foreground, Operators"),
    ("types", "Types"),
    ("keywords", "Procedures, Keywords"),
    ("strings", "Constants, Strings"),
    ("special", "Pre-Processor, Special"),
    ("errors", "Errors"),
    ("comments", "Comments"),
)

ROLE_NAMES = tuple(name for name, _ in ROLES)
SLOT_COUNT = len(ROLES)

RULE_TEMPLATE = Template("      #c$slot { fill: $fill; } <!-- $label -->")

# $rules is filled with one RULE_TEMPLATE line per role, in slot order
SCHEME_TEMPLATE = Template("""\
<svg width="288px" height="140px" xmlns="http://www.w3.org/2000/svg" baseProfile="full" version="1.1">
   <title>$title</title>
   <version>$version</version>
   <style>
$rules
   </style>

   <!-- Language Preview -->
   <rect width="288px" height="140px" rx="10px" id="c0"></rect>
   <text style="font-family:ui-monospace,monospace;font-size: 12px;font-weight:400;" id="c1">\
<tspan x="5px" y="19px"><tspan id="c5">import</tspan> <tspan id="c4">"fmt"</tspan></tspan>\
<tspan x="19px" y="33px"></tspan>\
<tspan x="5px" y="47px"><tspan id="c3">type</tspan> Point <tspan id="c2">struct</tspan> {</tspan>\
<tspan x="19px" y="61px">X, Y <tspan id="c2">float32</tspan></tspan>\
<tspan x="5px" y="75px">}</tspan>\
<tspan x="5px" y="89px"><tspan id="c3">func</tspan> <tspan id="c3">main</tspan>() {</tspan>\
<tspan x="19px" y="103px">p := Point{ <tspan id="c6" style="text-decoration: underline wavy">x</tspan>: \
<tspan id="c4">10</tspan>, Y: <tspan id="c4">30</tspan> }</tspan>\
<tspan x="19px" y="117px">fmt.printf(<tspan id="c4">"Point %<tspan id="c5">\\n</tspan>"</tspan>, p)</tspan>\
<tspan x="5px" y="131px">} <tspan id="c7">// This is a comment</tspan></tspan></text>
</svg>
""")

# Preview chart layout constants
FONTS = {
    "mono": [
        "SF Mono", "SFMono-Regular", "Menlo",
        "Monaco", "Consolas", "DejaVu Sans Mono", "monospace",
    ],
}

LAYOUT = {
    "figsize": (8.0, 3.2),
    "dpi": 80,
    "title_size": 14,
    "label_size": 10,
    "swatch_width": 0.9,      # fraction of one slot column
    "swatch_height": 1.0,
    "spine_width": 0.8,
}
