"""Dining philosophers simulation: argument parsing, the table and the run loop."""