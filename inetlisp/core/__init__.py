"""Opcodes, functions, frames, primitives, rules, modules, tasks and the worker that reduces nets."""