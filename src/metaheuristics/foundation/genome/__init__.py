"""Genome containers: chromosome, individual and population."""

from metaheuristics.foundation.genome.chromosome import Chromosome
from metaheuristics.foundation.genome.individual import Individual
from metaheuristics.foundation.genome.population import Population

__all__ = ["Chromosome", "Individual", "Population"]
