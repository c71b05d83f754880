from __future__ import annotations

from simulift.safety.report import RiskLevel, SafetyReport

GUSTY_WIND_MPS = 15.0
HEAVY_LOAD_RATIO = 0.85
CAUTION_LOAD_RATIO = 0.7
CAUTION_WIND_MPS = 10.0
CAUTION_SWING_DEG = 5.0
UNSAFE_WIND_MPS = 20.0


def lift_advice(report: SafetyReport) -> str:
    if not report.safe_to_lift:
        return "DO NOT PROCEED. Address safety concerns first."
    if report.risk_level is RiskLevel.LOW:
        return "Proceed with lift. Conditions are favorable."
    return "Proceed with caution. Monitor wind conditions."


def recommendations(report: SafetyReport) -> list[str]:
    if report.risk_level.severity not in ("HIGH", "CRITICAL"):
        return ["Standard 3D safety protocols", "Monitor conditions during lift"]

    out = ["Use 3D simulation to verify dynamics"]
    if report.wind_speed_mps > GUSTY_WIND_MPS:
        out += ["Monitor wind direction and gusts", "Consider postponing lift"]
    if report.load_ratio > HEAVY_LOAD_RATIO:
        out += ["Verify crane capacity and stability", "Use additional safety measures"]
    return out


def cautions(report: SafetyReport, swing_angle_deg: float | None = None) -> list[str]:
    """Caution lines for a lift that is safe but not LOW risk."""
    if not report.safe_to_lift or report.risk_level.severity not in ("HIGH", "MEDIUM"):
        return []
    out: list[str] = []
    if report.load_ratio > CAUTION_LOAD_RATIO:
        out.append(f"Load is {report.load_ratio * 100:.0f}% of crane capacity")
    if report.wind_speed_mps > CAUTION_WIND_MPS:
        out.append(f"Wind speed {report.wind_speed_mps:.2f} m/s - monitor conditions")
    if swing_angle_deg is not None and swing_angle_deg > CAUTION_SWING_DEG:
        out.append(f"Expected swing angle: {swing_angle_deg:.1f} degrees")
    return out


def issues(report: SafetyReport) -> list[str]:
    if report.safe_to_lift:
        return []
    out: list[str] = []
    if report.load_ratio > 1.0:
        out.append(f"OVERLOAD: Load exceeds crane capacity by {(report.load_ratio - 1.0) * 100:.0f}%")
    if report.wind_speed_mps > UNSAFE_WIND_MPS:
        out.append(f"DANGEROUS WIND: Speed {report.wind_speed_mps:.2f} m/s exceeds safe limit")
    return out


SAFE_RECOMMENDATIONS: tuple[str, ...] = (
    "Monitor wind conditions during lift",
    "Use tag lines to control swing",
    "Maintain clear zone around payload",
    "Follow standard rigging procedures",
)

REQUIRED_ACTIONS: tuple[str, ...] = (
    "Review and reduce load if possible",
    "Consider higher capacity crane",
    "Wait for better weather conditions",
    "Consult certified lifting engineer",
)
