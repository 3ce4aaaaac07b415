from truthy.exceptions.core import TruthyException

__all__ = ["TruthyException"]
