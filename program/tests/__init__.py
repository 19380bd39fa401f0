"""Tests for the expression-to-TAC compiler and its front ends."""
