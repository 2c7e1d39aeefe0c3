# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for crdgen documentation."""

project = "crdgen"
author = "crdgen Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
