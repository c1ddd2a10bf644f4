"""
Supply Domain - the supply board.

Products carry a stock level that operators correct freely:
leftovers (剩食), scarce (稀少), out of stock (缺貨), sufficient (充足).
"""
