"""Detect pass-through variables and undeclared module inputs in Terraform trees."""

__version__ = "0.1.0"
