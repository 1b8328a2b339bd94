from hubspot_practicum.main import run

if __name__ == "__main__":
    run()
