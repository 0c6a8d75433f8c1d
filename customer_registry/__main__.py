from customer_registry.main import run

if __name__ == "__main__":
    run()
