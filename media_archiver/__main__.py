from .cli.organize import organize

if __name__ == "__main__":
    organize()
