"""Parse labeled stacks of crates and crane instructions, run the crane and report the tops"""
