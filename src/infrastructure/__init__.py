"""Adapters for the LeetCode API and the local filesystem."""
