"""
Core domain models, mathematical primitives, and invariants.

Модель цепной дроби и численные примитивы. Ядро не выполняет
ввод/вывод и не зависит от внешних систем.
"""
