"""
EDMX documents shared by the test modules.
"""

SAP_V2_METADATA = """<?xml version="1.0" encoding="utf-8"?>
<edmx:Edmx Version="1.0" xmlns:edmx="http://schemas.microsoft.com/ado/2007/06/edmx"
    xmlns:m="http://schemas.microsoft.com/ado/2007/08/dataservices/metadata"
    xmlns:sap="http://www.sap.com/Protocols/SAPData">
  <edmx:DataServices m:DataServiceVersion="2.0">
    <Schema Namespace="ZSALES_SRV" xml:lang="en" sap:schema-version="1"
        xmlns="http://schemas.microsoft.com/ado/2008/09/edm">
      <EntityType Name="SalesOrder" sap:content-version="1">
        <Key><PropertyRef Name="OrderID"/></Key>
        <Property Name="OrderID" Type="Edm.String" Nullable="false" MaxLength="10" sap:label="Sales Order"/>
        <Property Name="NetAmount" Type="Edm.Decimal" Precision="15" Scale="2"/>
        <Property Name="CustomerID" Type="Edm.Guid"/>
        <NavigationProperty Name="Items" Relationship="ZSALES_SRV.OrderItems"
            FromRole="FromRole_OrderItems" ToRole="ToRole_OrderItems"/>
        <NavigationProperty Name="Customer" Relationship="ZSALES_SRV.OrderCustomer"
            FromRole="FromRole_OrderCustomer" ToRole="ToRole_OrderCustomer"/>
        <NavigationProperty Name="Notes" Relationship="ZSALES_SRV.OrderNotes"
            FromRole="FromRole_OrderNotes" ToRole="ToRole_OrderNotes"/>
        <NavigationProperty Name="Ghost" Relationship="ZSALES_SRV.Missing" FromRole="X" ToRole="Y"/>
      </EntityType>
      <EntityType Name="SalesOrderItem">
        <Key><PropertyRef Name="OrderID"/><PropertyRef Name="ItemNo"/></Key>
        <Property Name="OrderID" Type="Edm.String" Nullable="false"/>
        <Property Name="ItemNo" Type="Edm.Int32" Nullable="false"/>
      </EntityType>
      <EntityType Name="Customer">
        <Key><PropertyRef Name="CustomerID"/></Key>
        <Property Name="CustomerID" Type="Edm.Guid" Nullable="false"/>
      </EntityType>
      <EntityType Name="Note">
        <Key><PropertyRef Name="NoteID"/></Key>
        <Property Name="NoteID" Type="Edm.Int64" Nullable="false"/>
      </EntityType>
      <Association Name="OrderItems">
        <End Type="ZSALES_SRV.SalesOrder" Multiplicity="1" Role="FromRole_OrderItems"/>
        <End Type="ZSALES_SRV.SalesOrderItem" Multiplicity="*" Role="ToRole_OrderItems"/>
      </Association>
      <Association Name="OrderCustomer">
        <End Type="ZSALES_SRV.SalesOrder" Multiplicity="*" Role="FromRole_OrderCustomer"/>
        <End Type="ZSALES_SRV.Customer" Multiplicity="1" Role="ToRole_OrderCustomer"/>
      </Association>
      <Association Name="OrderNotes">
        <End Type="ZSALES_SRV.SalesOrder" Multiplicity="1" Role="FromRole_OrderNotes"/>
        <End Type="ZSALES_SRV.Note" Multiplicity="0..1" Role="ToRole_OrderNotes"/>
      </Association>
      <EntityContainer Name="ZSALES_SRV_Entities" m:IsDefaultEntityContainer="true">
        <EntitySet Name="SalesOrders" EntityType="ZSALES_SRV.SalesOrder" sap:creatable="false"
            sap:updatable="False" sap:deletable="TRUE" sap:pageable="false" sap:searchable="true"
            sap:label="Sales Orders"/>
        <EntitySet Name="SalesOrderItems" EntityType="ZSALES_SRV.SalesOrderItem"/>
        <EntitySet Name="Customers" EntityType="ZSALES_SRV.Customer" sap:creatable="maybe"/>
        <EntitySet Name="Orphans" EntityType="ZSALES_SRV.DoesNotExist"/>
        <FunctionImport Name="ReleaseOrder" ReturnType="ZSALES_SRV.SalesOrder" EntitySet="SalesOrders"
            m:HttpMethod="POST" sap:label="Release">
          <Parameter Name="OrderID" Type="Edm.String" Mode="In"/>
          <Parameter Name="Quantity" Type="Edm.Int32" Mode="In"/>
        </FunctionImport>
        <FunctionImport Name="GetStatistics" ReturnType="Edm.String" m:HttpMethod="GET"/>
      </EntityContainer>
    </Schema>
  </edmx:DataServices>
</edmx:Edmx>
"""

V4_METADATA = """<?xml version="1.0" encoding="utf-8"?>
<edmx:Edmx Version="4.0" xmlns:edmx="http://docs.oasis-open.org/odata/ns/edmx">
  <edmx:DataServices>
    <Schema Namespace="Trippin.Model" xmlns="http://docs.oasis-open.org/odata/ns/edm">
      <EnumType Name="PersonGender">
        <Member Name="Male" Value="0"/>
        <Member Name="Female" Value="1"/>
        <Member Name="Unknown" Value="2"/>
      </EnumType>
      <ComplexType Name="Location">
        <Property Name="Address" Type="Edm.String"/>
        <Property Name="Coordinates" Type="Collection(Edm.Double)"/>
      </ComplexType>
      <EntityType Name="Entity" Abstract="true">
        <Key><PropertyRef Name="Id"/></Key>
        <Property Name="Id" Type="Edm.Int32" Nullable="false"/>
        <Property Name="CreatedAt" Type="Edm.DateTimeOffset"/>
      </EntityType>
      <EntityType Name="Person" BaseType="Trippin.Model.Entity">
        <Property Name="UserName" Type="Edm.String" Nullable="false"/>
        <Property Name="Emails" Type="Collection(Edm.String)"/>
        <Property Name="AddressInfo" Type="Collection(Trippin.Model.Location)"/>
        <Property Name="Gender" Type="Trippin.Model.PersonGender"/>
        <NavigationProperty Name="Friends" Type="Collection(Trippin.Model.Person)"/>
        <NavigationProperty Name="BestFriend" Type="Trippin.Model.Person" Partner="BestFriendOf">
          <ReferentialConstraint Property="BestFriendId" ReferencedProperty="Id"/>
        </NavigationProperty>
        <NavigationProperty Name="Trips" Type="Collection(Trippin.Model.Trip)" ContainsTarget="true"/>
      </EntityType>
      <EntityType Name="Employee" BaseType="Trippin.Model.Person">
        <Property Name="Cost" Type="Edm.Int64"/>
      </EntityType>
      <EntityType Name="Trip">
        <Key><PropertyRef Name="TripId"/></Key>
        <Property Name="TripId" Type="Edm.Int32" Nullable="false"/>
        <Property Name="Budget" Type="Edm.Single"/>
      </EntityType>
      <EntityType Name="Airline">
        <Key><PropertyRef Name="AirlineCode"/></Key>
        <Property Name="AirlineCode" Type="Edm.String" Nullable="false"/>
      </EntityType>
      <Action Name="ResetDataSource"/>
      <Action Name="ShareTrip" IsBound="true" EntitySetPath="person">
        <Parameter Name="person" Type="Trippin.Model.Person" Nullable="false"/>
        <Parameter Name="userName" Type="Edm.String"/>
        <ReturnType Type="Edm.Boolean" Nullable="false"/>
      </Action>
      <Function Name="GetNearestAirport" IsComposable="true">
        <Parameter Name="lat" Type="Edm.Double" Nullable="false"/>
        <ReturnType Type="Trippin.Model.Airline"/>
      </Function>
      <EntityContainer Name="Container">
        <EntitySet Name="People" EntityType="Trippin.Model.Person">
          <NavigationPropertyBinding Path="Friends" Target="People"/>
        </EntitySet>
        <EntitySet Name="Employees" EntityType="Trippin.Model.Employee"/>
        <EntitySet Name="Airlines" EntityType="Trippin.Model.Airline"/>
        <Singleton Name="Me" Type="Trippin.Model.Person">
          <NavigationPropertyBinding Path="Friends" Target="People"/>
          <NavigationPropertyBinding Path="Trippin.Model.Employee/Airline" Target="Airlines"/>
          <NavigationPropertyBinding Path="Nowhere" Target="Missing"/>
        </Singleton>
        <FunctionImport Name="GetNearestAirport" Function="Trippin.Model.GetNearestAirport" EntitySet="Airlines"/>
      </EntityContainer>
      <Annotations Target="Trippin.Model.Entity">
        <Annotation Term="Org.OData.Core.V1.Description" String="root"/>
        <Annotation Term="Org.OData.Core.V1.Computed" Bool="true"/>
      </Annotations>
      <Annotations Target="Trippin.Model.Person">
        <Annotation Term="Org.OData.Capabilities.V1.SearchRestrictions"/>
        <Annotation Term="Org.OData.Core.V1.Description"/>
      </Annotations>
    </Schema>
  </edmx:DataServices>
</edmx:Edmx>
"""

MULTI_SCHEMA_METADATA = """<edmx:Edmx Version="4.0" xmlns:edmx="http://docs.oasis-open.org/odata/ns/edmx">
  <edmx:DataServices>
    <Schema Namespace="Catalog.Types" xmlns="http://docs.oasis-open.org/odata/ns/edm">
      <EnumType Name="Color"><Member Name="Red"/><Member Name="Blue"/></EnumType>
      <ComplexType Name="Dimensions"><Property Name="Width" Type="Edm.Double"/></ComplexType>
      <EntityType Name="Product">
        <Key><PropertyRef Name="Sku"/></Key>
        <Property Name="Sku" Type="Edm.String" Nullable="false"/>
      </EntityType>
    </Schema>
    <Schema Namespace="Catalog.Service" xmlns="http://docs.oasis-open.org/odata/ns/edm">
      <ComplexType Name="Price"><Property Name="Amount" Type="Edm.Decimal"/></ComplexType>
      <EntityContainer Name="Catalog">
        <EntitySet Name="Products" EntityType="Catalog.Types.Product"/>
      </EntityContainer>
    </Schema>
  </edmx:DataServices>
</edmx:Edmx>
"""

NO_CONTAINER_METADATA = """<edmx:Edmx Version="4.0" xmlns:edmx="http://docs.oasis-open.org/odata/ns/edmx">
  <edmx:DataServices>
    <Schema Namespace="Empty" xmlns="http://docs.oasis-open.org/odata/ns/edm">
      <EntityType Name="Lonely"><Property Name="Id" Type="Edm.Int32"/></EntityType>
    </Schema>
  </edmx:DataServices>
</edmx:Edmx>
"""


def schema_snippet(body: str, namespace: str = "Test") -> str:
    """Wraps EDM elements in a Schema element."""
    return (f'<Schema Namespace="{namespace}" xmlns="http://docs.oasis-open.org/odata/ns/edm" '
            f'xmlns:sap="http://www.sap.com/Protocols/SAPData">{body}</Schema>')
