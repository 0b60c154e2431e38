#!/usr/bin/env python3
"""
Example of a strict workflow configured from the environment.

    DRAFTMACHINE_STRICT=true DRAFTMACHINE_APPROVALS_REQUIRED=3 python examples/strict_example.py
"""

import logging

from draftmachine import Document, InvalidTransitionError, WorkflowSettings

logger = logging.getLogger(__name__)


def main():
    settings = WorkflowSettings.from_env()
    doc = Document(settings)
    logger.info(f"Workflow settings: {settings}")

    doc.add_text("Quarterly report")
    doc.request_review()

    try:
        doc.add_text(" (late edit)")
    except InvalidTransitionError as e:
        logger.info(f"Refused: {e}")

    while not doc.is_published:
        doc.approve()
        logger.info(f"Approvals so far: {doc.approvals}, status: {doc.status.value}")

    print(f"Published: {doc.content()!r}")


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    main()
