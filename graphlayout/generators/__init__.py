"""Generators for sample graphs in JSON, CSV and DOT formats."""