"""
Test module for the TAC (Three Address Code) core.

Covers the tokenizer, the instruction record, temporary allocation, the
operator-precedence generator, the derived IR views and the end-to-end
pipeline.
"""
