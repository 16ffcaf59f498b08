"""Fastly VCL syntax tree, VCL input resolvers, Terraform plan input and transformer runner."""

__version__ = "0.1.0"

__all__ = [
    "declarations",
    "expressions",
    "meta",
    "resolver",
    "statements",
    "terraform",
    "transform",
]