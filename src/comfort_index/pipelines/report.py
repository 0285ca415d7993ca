"""Human-readable rendering of a CEI result."""

from __future__ import annotations

from typing import Optional

from ..models import CeiResult


def format_cei_report(result: CeiResult, location: Optional[str] = None) -> str:
    """Format a CEI result as a short plain-text report."""

    components = result.components
    header = "=== Comfort Environment Index ==="
    if location:
        header += f"\nLocation: {location}"

    report = f"""{header}

CEI: {result.cei}/100 ({result.level})

Components:
- Thermal:  {components.heat_score}
- Air:      {components.air_score}
- UV:       {components.uv_score}
- Pressure: {components.press_score}

Summary: """

    if result.cei >= 75:
        report += "Pleasant conditions for being outdoors."
    elif result.cei >= 60:
        report += "Conditions are acceptable."
    elif result.cei >= 45:
        report += "Noticeably uncomfortable conditions."
    else:
        report += "Poor conditions. Limit time outdoors."

    return report
