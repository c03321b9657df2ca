"""Document Analyzer - keyword, sentiment, risk and readability heuristics.

See core.analysis.document_analyzer for the analyzer and core.analysis.lexicon
for the word lists it scans for.
"""
