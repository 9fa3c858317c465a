"""Puzzle solutions for the 2024 series: days 1 to 7."""