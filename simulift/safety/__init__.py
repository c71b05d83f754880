from simulift.safety.report import RiskLevel, SafetyReport, classify_risk, evaluate

__all__ = ["RiskLevel", "SafetyReport", "classify_risk", "evaluate"]
