"""Puzzle solutions for the 2023 series: days 1, 2, 4 to 13 and 15."""