"""Exports & reporting: JSON rendering of the CII tree and Markdown reports.

- writers.py: CrossIndustryInvoice -> dict / JSON string
- reports.py: conversion report from the error sink
"""
