"""Market Value Object.

A Bing Dictionary market (the ``mkt`` query parameter) together with the
boilerplate phrase the result page wraps around a genuine translation.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Market:
    """Immutable value object representing a dictionary market."""

    code: str
    boilerplate_head: str
    boilerplate_tail: str
    boilerplate_length: int = field(init=False)

    def __post_init__(self) -> None:
        # Byte length of the phrase surrounding the escaped query
        object.__setattr__(
            self,
            "boilerplate_length",
            len(self.head_bytes) + len(self.tail_bytes),
        )

    @property
    def head_bytes(self) -> bytes:
        return self.boilerplate_head.encode("utf-8")

    @property
    def tail_bytes(self) -> bytes:
        return self.boilerplate_tail.encode("utf-8")


# ── Market instances ──────────────────────────────────────────

# "必应词典为您提供<query>的释义，..." ("Bing Dictionary provides the
# following result for you")
ZH_CN = Market(
    code="zh-cn",
    boilerplate_head="必应词典为您提供",
    boilerplate_tail="的释义，",
)


# ── Registry ──────────────────────────────────────────────────

MARKETS: dict[str, Market] = {market.code: market for market in (ZH_CN,)}


def get_market(code: str) -> Market | None:
    """Look up a Market by its ``mkt`` code (e.g., "zh-cn").

    Returns None for unsupported codes.
    """
    return MARKETS.get(code.lower()) if code else None
