"""
statecore CLI

Commands:
- statecore check - Run reducer shape probes
- statecore replay - Replay an action log through a reducer
- statecore version - Show version information
"""
