"""Nodes, node constructors, wires, ports and the patterns that match nets."""