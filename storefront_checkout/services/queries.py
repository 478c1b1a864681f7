"""
GraphQL documents sent by the services.

The in-process mock reads these line by line: keep one operation per
document, the root field on its own line and ``@inContext`` on the line
after the operation signature.
"""

# ── Storefront API: cart ─────────────────────────────────────────────────────

CART_CREATE = """
mutation cartCreate($input: CartInput) {
  cartCreate(input: $input) {
    cart {
      id
    }
    userErrors {
      field
      message
    }
  }
}
"""

CART_BUYER_IDENTITY_UPDATE = """
mutation cartBuyerIdentityUpdate($cartId: ID!, $buyerIdentity: CartBuyerIdentityInput!) {
  cartBuyerIdentityUpdate(cartId: $cartId, buyerIdentity: $buyerIdentity) {
    cart {
      id
      buyerIdentity {
        countryCode
      }
      estimatedCost {
        totalTaxAmount {
          amount
          currencyCode
        }
      }
    }
    userErrors {
      field
      message
    }
  }
}
"""

SELLING_PLAN_ALLOCATION_FRAGMENT = """
            sellingPlanAllocation {
              sellingPlan {
                id
              }
            }"""

CART_GET = """
query cart($cartId: ID!, $countryCode: CountryCode!)
  @inContext(country: $countryCode) {
    cart( id: $cartId ) {
      id
      createdAt
      updatedAt
      checkoutUrl
      buyerIdentity {
        countryCode
        email
      }
      attributes {
        key
        value
      }
      discountCodes {
        code
        applicable
      }
      note
      lines(first: 25, reverse: true) {
        edges {
          node {
            id
            attributes {
              key
              value
            }
            quantity{selling_plan_allocation}
            discountAllocations {
              discountedAmount {
                amount
                currencyCode
              }
            }
            estimatedCost {
              subtotalAmount {
                amount
              }
              totalAmount {
                amount
              }
            }
            merchandise {
              ... on ProductVariant {
                id
                title
                priceV2 {
                  amount
                  currencyCode
                }
                product {
                  id
                  availableForSale
                  variants(first: 6) {
                    edges {
                      node {
                        id
                      }
                    }
                  }
                  title
                  images(first: 1) {
                    edges {
                      node {
                        id
                        src
                        altText
                      }
                    }
                  }
                }
              }
            }
          }
        }
      }
      estimatedCost {
        totalAmount {
          amount
          currencyCode
        }
        subtotalAmount {
          amount
          currencyCode
        }
        totalTaxAmount {
          amount
          currencyCode
        }
        totalDutyAmount {
          amount
          currencyCode
        }
      }
    }
}
"""

CART_LINES_ADD = """
mutation cartLinesAdd($lines: [CartLineInput!]!, $cartId: ID!) {
  cartLinesAdd( lines: $lines, cartId: $cartId ) {
    cart {
      id
    }
    userErrors {
      field
      message
    }
  }
}
"""

CART_LINES_UPDATE = """
mutation cartLinesUpdate($cartId: ID!, $lines: [CartLineUpdateInput!]!) {
  cartLinesUpdate(cartId: $cartId, lines: $lines) {
    cart {
      id
    }
    userErrors {
      field
      message
    }
  }
}
"""

CART_LINES_REMOVE = """
mutation cartLinesRemove($cartId: ID!, $lineIds: [ID!]!) {
  cartLinesRemove(cartId: $cartId, lineIds: $lineIds) {
    cart {
      id
    }
    userErrors {
      field
      message
    }
  }
}
"""

CART_NOTE_UPDATE = """
mutation cartNoteUpdate($cartId: ID!, $note: String) {
  cartNoteUpdate(cartId: $cartId, note: $note) {
    cart {
      id
    }
    userErrors {
      field
      message
    }
  }
}
"""

CART_ATTRIBUTES_UPDATE = """
mutation cartAttributesUpdate($attributes: [AttributeInput!]!, $cartId: ID!) {
  cartAttributesUpdate(attributes: $attributes, cartId: $cartId) {
    cart {
      id
    }
    userErrors {
      field
      message
    }
  }
}
"""

CART_DISCOUNT_CODES_UPDATE = """
mutation cartDiscountCodesUpdate($cartId: ID!, $discountCodes: [String!]!) {
  cartDiscountCodesUpdate(discountCodes: $discountCodes, cartId: $cartId) {
    cart {
      id
    }
    userErrors {
      field
      message
    }
  }
}
"""


# ── Admin API: selling plan groups ───────────────────────────────────────────

SELLING_PLAN_FIELDS = """
            id
            billingPolicy {
              ... on SellingPlanFixedBillingPolicy {
                checkoutCharge {
                  type
                  value {
                    ... on SellingPlanCheckoutChargePercentageValue {
                      percentage
                    }
                  }
                }
                remainingBalanceChargeExactTime
                remainingBalanceChargeTrigger
              }
            }
            category
            createdAt
            deliveryPolicy {
              ... on SellingPlanFixedDeliveryPolicy {
                fulfillmentTrigger
              }
            }
            inventoryPolicy {
              reserve
            }
            name
            options"""

SELLING_PLAN_GROUP_CREATE = """
mutation sellingPlanGroupCreate($input: SellingPlanGroupInput!) {
  sellingPlanGroupCreate(input: $input) {
    sellingPlanGroup {
      id
    }
    userErrors {
      field
      message
    }
  }
}
"""

SELLING_PLAN_GROUP_ADD_PRODUCTS = """
mutation sellingPlanGroupAddProducts($id: ID!, $productIds: [ID!]!) {
  sellingPlanGroupAddProducts(id: $id, productIds: $productIds) {
    sellingPlanGroup {
      id
    }
    userErrors {
      field
      message
    }
  }
}
"""

SELLING_PLAN_GROUP_ADD_PRODUCT_VARIANTS = """
mutation sellingPlanGroupAddProductVariants($id: ID!, $productVariantIds: [ID!]!) {
  sellingPlanGroupAddProductVariants(id: $id, productVariantIds: $productVariantIds) {
    sellingPlanGroup {
      id
    }
    userErrors {
      field
      message
    }
  }
}
"""

SELLING_PLAN_GROUP_DELETE = """
mutation sellingPlanGroupDelete($id: ID!) {
  sellingPlanGroupDelete(id: $id) {
    deletedSellingPlanGroupId
    userErrors {
      field
      message
    }
  }
}
"""

SELLING_PLAN_GROUP_GET = """
query SellingPlanGroup($sellingPlanGroupId: ID!) {
  sellingPlanGroup(id: $sellingPlanGroupId) {
    id
    createdAt
    merchantCode
    name
    description
    options
    position
    productCount
    productVariantCount
    summary
    products(first: 10) {
      edges {
        node {
          id
          title
        }
      }
    }
    productVariants(first: 10) {
      edges {
        node {
          id
          title
        }
      }
    }
    sellingPlans(first: 10) {
      edges {
        node {""" + SELLING_PLAN_FIELDS + """
        }
      }
    }
  }
}
"""

SELLING_PLAN_GROUPS_LIST = """
query SellingPlanGroupsList($first: Int!, $offset: Int) {
  sellingPlanGroups(first: $first) {
    edges {
      cursor
      node {
        id
        createdAt
        merchantCode
        name
        description
        options
        position
        productCount
        summary
        sellingPlans(first: 10) {
          edges {
            node {""" + SELLING_PLAN_FIELDS + """
            }
          }
        }
      }
    }
  }
}
"""
