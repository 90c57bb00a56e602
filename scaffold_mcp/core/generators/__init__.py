"""Test generators - template-based stub documents."""

from .base import GeneratedTest, GeneratedTestCase, TestGeneratorBase
from .template import TemplateGenerator, generate_tests, render_test_document

__all__ = [
    "TestGeneratorBase",
    "GeneratedTestCase",
    "GeneratedTest",
    "TemplateGenerator",
    "generate_tests",
    "render_test_document",
]
