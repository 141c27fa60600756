# ABOUTME: Canned HTML pages and web-app manifests for favicon discovery tests.
# ABOUTME: Documents mirror the shapes real sites use for link, meta and manifest icons.

import json

BASE_URL = "https://example.com/"

# One 32x32 link icon plus a manifest reference.
SIMPLE_HTML = b"""<!DOCTYPE html>
<html>
<head>
  <title>Simple</title>
  <link rel="icon" sizes="32x32" href="/i.png">
  <link rel="manifest" href="/manifest.json">
</head>
<body><p>Hello</p></body>
</html>
"""

SIMPLE_MANIFEST = json.dumps(
    {
        "name": "Simple",
        "icons": [
            {"src": "/icons/android-chrome.png", "sizes": "192x192", "type": "image/png"},
        ],
    }
).encode()

# Nine distinct icons of assorted formats and sizes.
MULTIFORMAT_HTML = b"""<!DOCTYPE html>
<html>
<head>
  <title>Multiformat</title>
  <link rel="shortcut icon" href="/favicon.ico">
  <link rel="icon" type="image/png" href="/icon-16x16.png">
  <link rel="icon" type="image/png" sizes="32x32" href="/icon-32.png">
  <link rel="apple-touch-icon" sizes="180x180" href="/apple-touch-icon.png">
  <link rel="icon" sizes="192x192" href="/icon-192.png">
  <link rel="icon" sizes="400x200" href="/wide.png">
  <link rel="mask-icon" href="/mask.svg" color="#000000">
  <meta property="og:image" content="https://example.com/og.jpg">
  <meta property="og:image:width" content="400">
  <meta property="og:image:height" content="400">
  <meta name="msapplication-TileImage" content="/mstile-144x144.png">
</head>
<body></body>
</html>
"""

MULTIFORMAT_RANKED_URLS = [
    "https://example.com/wide.png",
    "https://example.com/og.jpg",
    "https://example.com/icon-192.png",
    "https://example.com/apple-touch-icon.png",
    "https://example.com/mstile-144x144.png",
    "https://example.com/icon-32.png",
    "https://example.com/icon-16x16.png",
    "https://example.com/mask.svg",
    "https://example.com/favicon.ico",
]

# Markup with no icon elements at all.
NO_MARKUP_HTML = b"""<!DOCTYPE html>
<html><head><title>Nothing here</title></head><body></body></html>
"""

# A manifest at the conventional /manifest.json location.
FALLBACK_MANIFEST = json.dumps(
    {
        "icons": [
            {"src": "icon-512.png", "sizes": "512x512", "type": "image/png"},
            {"src": "icon-192.png", "sizes": "192x192", "type": "image/png"},
        ]
    }
).encode()

# Entries exercising multi-size, "any", missing src and relative resolution.
ASSORTED_MANIFEST = {
    "name": "Assorted",
    "icons": [
        {"src": "/static/icon.ico", "sizes": "16x16 32x32 48x48", "type": "image/x-icon"},
        {"src": "logo.svg", "sizes": "any", "type": "image/svg+xml"},
        {"sizes": "96x96", "type": "image/png"},
        "not-an-object",
        {"src": "https://cdn.example.net/maskable.png", "sizes": "512x512"},
    ],
}

# Open Graph, Twitter and tile images, including structured OG properties.
SOCIAL_HTML = """<html><head>
  <meta property="og:image" content="/og-first.png">
  <meta property="og:image:width" content="1200">
  <meta property="og:image:height" content="630">
  <meta property="og:image:type" content="image/png">
  <meta property="og:image:secure_url" content="https://example.com/og-first.png">
  <meta name="twitter:image" content="https://example.com/twitter.jpg">
  <meta property="twitter:image:src" content="/twitter-src.jpg">
  <meta name="msapplication-TileImage" content="/tile.png">
  <meta name="description" content="not an image">
</head></html>
"""
