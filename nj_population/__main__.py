from nj_population.main import run

if __name__ == "__main__":
    run()
