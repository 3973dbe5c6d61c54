#!/usr/bin/env python3
"""
Terminal Form

A minimal rendering surface for the user details form: prompts for each
field, shows inline errors, and prints the collected data as JSON once
the form submits cleanly.
"""

import logging
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from userform.config.settings import LOG_LEVEL, LOG_FORMAT, VERBOSE
from userform.config.constants import DATE_FORMAT_HINT
from userform.config.field_registry import FieldKind, iter_field_rules
from userform.form_context import FormContext

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


def prompt_for(rule) -> str:
    """Build the prompt text for one field."""
    if rule.kind == FieldKind.CHECKBOX:
        return "I agree to the terms and conditions [y/N]: "
    if rule.choices:
        return f"{rule.label} ({' / '.join(rule.choices)}): "
    if rule.kind == FieldKind.DATE:
        return f"{rule.label} ({DATE_FORMAT_HINT}): "
    return f"{rule.label}: "


def ask_field(form: FormContext, rule):
    """Ask for a field until it validates."""
    while True:
        raw = input(prompt_for(rule))
        form.handle_change(rule.name, raw, rule.kind.value)
        form.handle_blur(rule.name)

        error = form.error_for(rule.name)
        if not error:
            return
        print(f"  [!!] {error}")


def main():
    print("\n=== User Details ===\n")

    form = FormContext(verbose=VERBOSE)

    while True:
        for rule in iter_field_rules():
            if form.field_status(rule.name) != "valid":
                ask_field(form, rule)

        result = form.handle_submit()
        if result.is_valid:
            print("\n=== Submitted ===\n")
            print(result.payload_json)
            return 0

        print("\nPlease fix the following:")
        for name, message in result.errors.items():
            print(f"  [!!] {name}: {message}")


if __name__ == "__main__":
    try:
        sys.exit(main())
    except (KeyboardInterrupt, EOFError):
        print("\nCancelled.")
        sys.exit(1)
