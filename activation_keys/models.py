from activation_keys.infrastructure.models import ActivationKey  # noqa: F401
