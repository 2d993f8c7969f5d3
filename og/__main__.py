from og.cli import run

# python -m og <command>, same as the og console script
if __name__ == "__main__":
    run()
