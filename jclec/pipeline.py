"""
Verification pipeline.

For every component and each of its vulnerable classes:
1. Verify the class inside the component's Maven artifact, when coordinates are given
2. Otherwise, or when the class is missing, search Maven Central for it
3. Print the outcome
"""

import sys
import logging
from typing import List, Optional, TextIO

from .models import Component, ClassCheck
from .verifier import ArtifactVerifier


class ClassVerificationPipeline:
    """Runs the verify-then-search flow over a list of components."""

    def __init__(
            self,
            verifier: ArtifactVerifier,
            out: Optional[TextIO] = None,
            logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the pipeline.

        Args:
            verifier: Artifact verifier (also provides the search fallback)
            out: Stream for the human-readable report; stdout if omitted
            logger: Logger to report through
        """
        self.verifier = verifier
        self.out = out
        self.logger = logger or logging.getLogger(__name__)

    def _print(self, line: str = ""):
        print(line, file=self.out or sys.stdout)

    def run(self, components: List[Component]) -> List[ClassCheck]:
        """
        Process every component in order.

        Returns:
            One ClassCheck per (component, vulnerable class) pair
        """
        checks = []
        for component in components:
            checks.extend(self.process_component(component))

        self.logger.info(f"Processed {len(checks)} classes across {len(components)} components")
        return checks

    def process_component(self, component: Component) -> List[ClassCheck]:
        self._print(f"\nVerifying component: {component.name}")
        return [self.process_class(component, class_name) for class_name in component.vulnerable_classes]

    def process_class(self, component: Component, class_name: str) -> ClassCheck:
        self._print(f"  Checking class: {class_name}")
        check = ClassCheck(component=component.name, class_name=class_name,
                           coordinates=component.coordinates)

        if component.has_coordinates:
            check.verification = self.verifier.check_class(component.coordinates, class_name)
            if check.verification.found:
                self._print(f"  ✓ Class found in {component.coordinates}")
                return check

            self.logger.debug(
                f"{class_name} not verified in {component.coordinates}: "
                f"{check.verification.status.value} {check.verification.reason}"
            )
            self._print(f"  ✗ Class not found in {component.coordinates}")
            self._print("  Searching for class in Maven Central...")
        else:
            self._print("  No Maven coordinates provided, searching...")

        check.search_results = self.verifier.search_for_class(class_name)
        self._report_search(check.search_results)
        return check

    def _report_search(self, results: List[str]):
        if results:
            self._print("  Found in the following artifacts:")
            for artifact in results:
                self._print(f"    - {artifact}")
        else:
            self._print("  Not found in Maven Central search")
