"""Общий набор матриц для проверки свойств RREF и подпространств."""

PROPERTY_MATRICES = [
    [["1", "0", "0"], ["0", "1", "0"], ["0", "0", "1"]],
    [["0", "0"], ["0", "0"]],
    [["1", "2"], ["2", "4"]],
    [["1", "0", "1"], ["0", "1", "1"]],
    [["1", "2", "3"], ["4", "5", "6"], ["7", "8", "9"]],
    [["1", "2"], ["3", "4"], ["5", "6"], ["7", "8"]],
    [["0", "3", "-6", "6", "4", "-5"], ["3", "-7", "8", "-5", "8", "9"], ["3", "-9", "12", "-9", "6", "15"]],
    [["1/2", "1/3"], ["1/4", "1/6"]],
    [["0", "0", "5"]],
    [["2"], ["0"], ["-1"]],
    [["0.1", "0.2", "0.3"], ["1", "1", "1"], ["-2", "0", "2.5"]],
]
