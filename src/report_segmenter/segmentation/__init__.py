"""Segmentation of generated report text into text and GFM table blocks.

Submodules:
  patterns     -- compiled regex patterns and marker constants
  classifiers  -- table-row / separator-row predicates and the fast-path guard
  schema       -- TextBlock / TableBlock Pydantic models
  tables       -- cell splitting and table materialization
  segmenter    -- line-by-line state machine
  formatting   -- markdown reconstruction, JSON export, summaries
  pipeline     -- parse_content() entry point and CLI
"""
