"""Worked solutions to Rust exercises, written in Python."""