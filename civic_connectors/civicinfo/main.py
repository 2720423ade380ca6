import json
from civic_connectors.civicinfo.api_client import CivicInfoClient

# Main pour tester manuellement le client Civic Information
# (nécessite CIVICINFO_API_KEY dans l'environnement ou le .env)


def main():
    client = CivicInfoClient.from_env()

## Liste des élections

    print("\n⏳ Récupération des élections disponibles...\n")
    elections = client.list_elections()
    print(json.dumps(elections.to_object(), indent=2, ensure_ascii=False))

## Via une adresse

    address = input("🏠 Entrez une adresse (ex: 1263 Pacific Ave. Kansas City KS) : ").strip()

    print(f"\n⏳ Récupération des représentants pour {address}...\n")
    representatives = client.representatives_by_address(address, levels=["country"])
    print(json.dumps(representatives.to_mapping(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
