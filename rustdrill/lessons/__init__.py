"""Worked lessons, one module per exercise topic."""