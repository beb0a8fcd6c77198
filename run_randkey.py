from randkey import generate_key

def main() -> None:
    key = generate_key("10", "2", "3")  # uses DEFAULT_CONFIG from config.py
    print("\n[Random Key Generator]")
    print(f"Generated key: {key}\n")

if __name__ == "__main__":
    main()
