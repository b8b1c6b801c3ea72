"""
Registration of the built-in quality gate.

RegisterQualityGates follows a start/stop lifecycle: start() is called once
while the process boots (see signals.py and the register_quality_gates
command), stop() has nothing to release.
"""
import logging

from core.loaded_templates.models import LoadedTemplate
from core.loaded_templates.services import is_registered, register_if_absent

from .core_config import BUILTIN_QUALITY_GATE, BUILTIN_QUALITY_GATE_CONDITIONS
from .services import QualityGateConditionsUpdater, QualityGates, QualityGateUpdater

logger = logging.getLogger(__name__)


class RegisterQualityGates:
    """
    Creates the built-in quality gate, its conditions and its default flag,
    then writes the loaded template marker, all in one transaction on the
    `using` database. Subsequent runs find the marker and do nothing.
    """

    def __init__(self, quality_gate_updater=QualityGateUpdater,
                 quality_gate_conditions_updater=QualityGateConditionsUpdater,
                 quality_gates=QualityGates, using=None):
        self.quality_gate_updater = quality_gate_updater
        self.quality_gate_conditions_updater = quality_gate_conditions_updater
        self.quality_gates = quality_gates
        self.using = using

    def start(self):
        self.register()

    def stop(self):
        pass

    def should_register(self) -> bool:
        """True iff no marker exists for the built-in gate."""
        return not is_registered(LoadedTemplate.QUALITY_GATE_TYPE, BUILTIN_QUALITY_GATE, using=self.using)

    def register(self) -> bool:
        """
        Register the built-in gate if should_register() holds inside the
        registration transaction.

        Returns:
            bool: True if the gate was created by this call
        """
        return register_if_absent(
            LoadedTemplate.QUALITY_GATE_TYPE,
            BUILTIN_QUALITY_GATE,
            self._create_builtin_quality_gate,
            using=self.using,
            should_register=self.should_register,
        )

    def _create_builtin_quality_gate(self):
        builtin = self.quality_gate_updater.create(BUILTIN_QUALITY_GATE, using=self.using)
        for condition in BUILTIN_QUALITY_GATE_CONDITIONS:
            self.quality_gate_conditions_updater.create_condition(
                builtin.pk,
                condition['metric_key'],
                condition['operator'],
                condition['warning_threshold'],
                condition['error_threshold'],
                condition['period'],
                using=self.using,
            )
        self.quality_gates.set_default(builtin.pk, using=self.using)
        logger.info(
            f"Created built-in quality gate '{builtin.name}' "
            f"with {len(BUILTIN_QUALITY_GATE_CONDITIONS)} conditions"
        )
