from .cli import main_context

# No error handling here. All catch-all handling lives in cli.run() so that
# both `python -m kubeswitch` (this module) and the installed `kctx` script
# entry point go through exactly the same code path.
if __name__ == "__main__":
    main_context()
