# src/assetmin/utils/transcoder.py

ESCAPE_MARKER = "\\u"


def escape(text: str) -> str:
    """
    Replaces every non-ASCII UTF-16 code unit with a \\uXXXX escape.

    Applying it twice is the same as applying it once, so the same function
    serves both for the text sent to a tool and for the text it sends back.
    Characters outside the BMP come out as their surrogate pair.
    """
    if text.isascii():
        return text

    out = []
    for ch in text:
        code = ord(ch)
        if code <= 0x7F:
            out.append(ch)
        elif code <= 0xFFFF:
            out.append(f"{ESCAPE_MARKER}{code:04x}")
        else:
            code -= 0x10000
            out.append(f"{ESCAPE_MARKER}{0xD800 + (code >> 10):04x}")
            out.append(f"{ESCAPE_MARKER}{0xDC00 + (code & 0x3FF):04x}")
    return "".join(out)
