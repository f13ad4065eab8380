"""Tests for the line classifiers."""

from terraform_module_drift.classify import (
    Assignment,
    is_block_close,
    match_assignment,
    match_declaration,
    match_module_open,
    match_references,
)


class TestDeclaration:
    def test_plain_header(self):
        assert match_declaration('variable "region" {') == "region"

    def test_leading_whitespace(self):
        assert match_declaration('   variable "vpc_cidr" {}') == "vpc_cidr"

    def test_other_block_types_ignored(self):
        assert match_declaration('output "region" {') is None
        assert match_declaration('locals {') is None

    def test_reference_is_not_a_declaration(self):
        assert match_declaration("  value = var.region") is None

    def test_comment_marker_defeats_match(self):
        assert match_declaration('# variable "old" {}') is None


class TestReferences:
    def test_single(self):
        assert match_references("  value = var.region") == ["region"]

    def test_multiple_in_order(self):
        line = 'name = "${var.prefix}-${var.env}-${var.prefix}"'
        assert match_references(line) == ["prefix", "env", "prefix"]

    def test_requires_word_boundary(self):
        assert match_references("x = myvar.thing + tvar.other") == []

    def test_none(self):
        assert match_references('source = "../modules/vm"') == []


class TestModuleOpen:
    def test_same_line_brace(self):
        assert match_module_open('module "vm" {') == "vm"

    def test_brace_on_next_line(self):
        assert match_module_open('  module "network"') == "network"

    def test_not_a_module(self):
        assert match_module_open('resource "aws_instance" "web" {') is None


class TestBlockClose:
    def test_bare_brace(self):
        assert is_block_close("}")
        assert is_block_close("   }  ")

    def test_brace_with_other_text(self):
        assert not is_block_close("},")
        assert not is_block_close("  tags = {}")


class TestAssignment:
    def test_reference_value(self):
        assert match_assignment("  count = var.instance_count") == Assignment(
            "count", "var.instance_count", "instance_count"
        )

    def test_literal_value(self):
        a = match_assignment('  source = "../modules/vm"')
        assert a.argument == "source"
        assert a.reference is None

    def test_first_reference_in_expression(self):
        a = match_assignment('  name = "${var.prefix}-${var.suffix}"')
        assert a.reference == "prefix"

    def test_comparison_is_not_assignment(self):
        assert match_assignment("  a == var.b") is None

    def test_not_an_assignment(self):
        assert match_assignment('module "vm" {') is None
