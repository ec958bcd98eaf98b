"""Dictionary data files bundled with lexicache."""
