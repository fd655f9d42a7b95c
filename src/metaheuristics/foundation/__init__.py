"""Leaf building blocks: errors, logging, timing, random generators, genomes and problems."""
