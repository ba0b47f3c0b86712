from tlgen.models.config import LabelConfig, WizardDefaults

__all__ = ["LabelConfig", "WizardDefaults"]
