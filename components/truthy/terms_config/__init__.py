from truthy.terms_config.core import ENV_VARS, TermsConfig, TermsConfigError

__all__ = ["ENV_VARS", "TermsConfig", "TermsConfigError"]
