"""Application commands (use cases) for wardrobe suggestions."""

from __future__ import annotations

import logging

from wardrobes.domain import (
    ConfigurationInput,
    IndustryStandards,
    WardrobeConfigurationAdvisor,
    WardrobeInputError,
)

from .dtos import SuggestionOutput
from .validation import validate_dimensions

logger = logging.getLogger(__name__)


class SuggestDefaultsCommand:
    """Command to suggest a wardrobe layout and its hardware.

    Validates dimensions before handing the input to the advisor, so the
    advisor only ever sees positive finite numbers.
    """

    def __init__(
        self,
        advisor: WardrobeConfigurationAdvisor | None = None,
        standards: IndustryStandards | None = None,
    ) -> None:
        self.advisor = advisor or WardrobeConfigurationAdvisor(standards)

    def execute(self, config_input: ConfigurationInput) -> SuggestionOutput:
        """Execute the suggestion command.

        Args:
            config_input: Dimensions, unit and type to suggest for.

        Returns:
            SuggestionOutput with the result and hardware schedule.

        Raises:
            InvalidDimensionError: If a dimension is not positive and finite.
        """
        try:
            validate_dimensions(
                config_input.width,
                config_input.height,
                config_input.depth,
                config_input.unit,
            )
        except WardrobeInputError as e:
            logger.warning(f"Rejected wardrobe input: {e}")
            raise

        result = self.advisor.suggest(config_input)
        hardware = self.advisor.hardware_for(result)
        logger.debug(
            f"Suggested {result.columns} columns with {len(result.notes)} note(s) "
            f"and {len(hardware)} hardware line(s)"
        )
        return SuggestionOutput(input=config_input, result=result, hardware=hardware)
