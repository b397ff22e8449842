from cpupm.cli import cpupm

cpupm()
