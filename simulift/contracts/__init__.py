from simulift.contracts.lift_config import Lift3DConfiguration, LiftConfiguration

__all__ = ["LiftConfiguration", "Lift3DConfiguration"]
