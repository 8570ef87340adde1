"""GraphQL documents used by the linking client."""

SUPPORTED_GAMES_QUERY = """
query GetSupportedGames {
  supportedGames {
    id
    name
    provider
    description
    iconUrl
    connectionType
    requiresOAuth
    scopes
    slug
    gameId
  }
}
"""

USER_PROVIDER_CONNECTIONS_QUERY = """
query GetUserProviderConnections {
  userProviderConnections {
    id
    providerId
    providerName
    providerDisplayName
    canonicalAccountId
    connectionType
    isActive
    connectedAt
    lastSuccessfulCall
  }
}
"""
