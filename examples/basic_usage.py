"""
Basic usage
===========

Generates an identifier and pushes an object graph through JsonEncoder:
plain encode, HTML-safe encode for embedding in a <script> tag, and decode
into both dicts and attribute records.

Run:
    python examples/basic_usage.py
"""

from dataclasses import dataclass, field

from sidekit import (
    CodecConfig,
    EncodeOption,
    InvalidArgumentError,
    JsonEncoder,
    UuidV4Generator,
)


# ---------------------------------------------------------------------------
# Domain objects
# ---------------------------------------------------------------------------

@dataclass
class Widget:
    widget_id: str
    title: str
    options: dict = field(default_factory=dict)


class Price:
    def __init__(self, cents: int, currency: str):
        self.cents = cents
        self.currency = currency

    def json_serialize(self):
        return {"amount": self.cents / 100, "currency": self.currency}


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main():
    ids = UuidV4Generator()
    encoder = JsonEncoder(CodecConfig(encode_options=EncodeOption.DEFAULT | EncodeOption.PRETTY_PRINT))

    widget = Widget(
        widget_id=ids.generate(),
        title="Tom & Jerry's <b>toolbox</b>",
        options={"price": Price(1999, "EUR"), "url": "https://example.com/w"},
    )

    print("== encode ==")
    print(encoder.encode(widget))

    print("\n== html_encode ==")
    html_safe = encoder.html_encode(widget)
    print(f"<script>var widget = {html_safe};</script>")

    print("\n== decode ==")
    as_dict = encoder.decode(html_safe)
    record = encoder.decode(html_safe, as_mapping=False)
    print(as_dict["title"])
    print(record.options.price.amount)

    print("\n== errors ==")
    for bad in ("{not json", [1, 2, 3]):
        try:
            encoder.decode(bad)
        except InvalidArgumentError as e:
            print(f"{bad!r}: {e.message} (code={e.code})")


if __name__ == "__main__":
    main()
